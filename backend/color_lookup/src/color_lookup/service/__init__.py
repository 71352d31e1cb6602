# This file makes the 'service' directory a Python sub-package
# within the 'color_lookup' service.
#
# It holds the color table and the lookup functions built on it.
