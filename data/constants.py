SEPARATOR_LINE_LENGTH = 60

UNPACKED_ALIGNMENT = 4
PACKED_ALIGNMENT = 2
