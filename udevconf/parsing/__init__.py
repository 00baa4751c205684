"""
Line scanning and variable="value" pair parsing for udev.conf.

Pure text handling: turns a byte buffer into lines and lines into pairs,
with a dedicated exception for every way a line can be malformed.
"""
