"""
Index limits and UTF-8 byte masks.
"""
import sys

# Largest value a buffer length or index can take (Py_ssize_t max)
MAX_INDEX = sys.maxsize

# UTF-8 continuation bytes look like 0b10xxxxxx
UTF8_CONTINUATION_MASK = 0xC0
UTF8_CONTINUATION_TAG = 0x80

# Text encoding assumed for str payloads
TEXT_ENCODING = "utf-8"
