"""
emit.py

C/C++ text for curve tables:
 - smallest of uint8_t / int8_t / uint16_t / int16_t that holds [min,max]
 - a single array declaration, 12 values per line
 - a PROGMEM-friendly header holding one or more declarations
"""

TYPE_LIMITS = {
    "uint8_t": (0, 255),
    "int8_t": (-128, 127),
    "uint16_t": (0, 65535),
    "int16_t": (-32768, 32767),
}

VALUES_PER_LINE = 12


def select_type(min_value, max_value):
    if min_value >= 0 and max_value <= 255: return "uint8_t"
    if min_value >= -128 and max_value <= 127: return "int8_t"
    if min_value >= 0 and max_value <= 65535: return "uint16_t"
    return "int16_t"


def out_of_type_range(values, ctype):
    """Return (index, value) pairs that do not fit `ctype`. Never raises."""
    lo, hi = TYPE_LIMITS[ctype]
    return [(i, v) for i, v in enumerate(values) if v < lo or v > hi]


def fmt_c_array(ctype, name, values, add_const=True, progmem_macro=None):
    """
    Format one array declaration.

    `progmem_macro` (e.g. "PROGMEM") is placed after the size and forces
    const. The result has no trailing newline:

        const uint8_t curve[4] PROGMEM = {
          0, 85, 170, 255
        };
    """
    code = ""
    if add_const or progmem_macro:
        code += "const "
    code += f"{ctype} {name}[{len(values)}]"
    if progmem_macro:
        code += f" {progmem_macro}"
    code += " = {\n  "
    last = len(values) - 1
    for i, v in enumerate(values):
        code += str(int(v))
        if i < last:
            code += ", "
            if (i + 1) % VALUES_PER_LINE == 0:
                code += "\n  "
    code += "\n};"
    return code


def header_guard(filename):
    stem = filename.rsplit("/", 1)[-1].split(".", 1)[0]
    guard = "".join(ch if ch.isalnum() else "_" for ch in stem.upper())
    if guard[:1].isdigit():
        guard = "_" + guard
    return guard + "_H"


def emit_header(arrays, guard="CURVE_TABLES_H", progmem_macro="PROGMEM"):
    """
    Wrap (ctype, name, values, add_const, progmem) tuples into a header.

    The pgmspace prelude defines `progmem_macro` away on non-Arduino hosts.
    """
    h = [f"#ifndef {guard}", f"#define {guard}", "", "#include <stdint.h>",
         "#ifdef ARDUINO", "#include <avr/pgmspace.h>", "#else",
         f"#ifndef {progmem_macro}", f"#define {progmem_macro}", "#endif", "#endif", ""]
    for ctype, name, values, add_const, progmem in arrays:
        h.append(f"#define {name.upper()}_SIZE {len(values)}")
        h.append(fmt_c_array(ctype, name, values, add_const=add_const,
                             progmem_macro=progmem_macro if progmem else None))
        h.append("")
    h.append("#endif")
    return "\n".join(h) + "\n"
