"""Small helpers for characters, numbers, buffers, strings, lists and I/O."""