import re
import string
import secrets

RANDOM_ALPHABET = string.ascii_lowercase + string.digits


def random_string_with_length(length):
    """ Generate a random lowercase alphanumeric string.
    """
    return "".join(secrets.choice(RANDOM_ALPHABET) for _ in range(length))


def replace_forward_slashes(value, replacement):
    """ Replace every forward slash ("/") in value with replacement.
    """
    return value.replace("/", replacement)


def replace_forward_slashes_with_dots(value):
    return replace_forward_slashes(value, ".")


def replace_forward_slashes_with_underscores(value):
    return replace_forward_slashes(value, "_")


def replace_dots_with_forward_slashes(value):
    """ Inverse of replace_forward_slashes_with_dots.
    """
    return value.replace(".", "/")


def to_dns_label_chars(value, replacement="-"):
    """ Lower-case value and replace anything outside [a-z0-9-] with replacement.
    """
    return re.sub(r"[^a-z0-9-]", replacement, value.lower())
