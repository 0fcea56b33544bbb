# seotemplates/app/seo/substitution.py
import re

# {{Name}} or {{ Name }}. Anything else (including an unterminated "{{")
# is left in the output as literal text.
PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def substitute(template, bindings):
    """
    Replaces every {{Name}} placeholder in `template` with bindings[Name].

    A placeholder whose name has no binding is removed from the output
    rather than left behind as literal text. Each occurrence of a repeated
    placeholder is replaced independently with the same value.
    """
    if not template:
        return ""

    def _replace(match):
        value = bindings.get(match.group(1))
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def find_variables(template):
    """Returns the placeholder names used in `template`, in first-seen order."""
    names = []
    for match in PLACEHOLDER_PATTERN.finditer(template or ""):
        if match.group(1) not in names:
            names.append(match.group(1))
    return names
