"""Item source and filename parsing.

Lists image filenames from the configured directory and turns each name into
a dated `ImageRecord`, dropping names whose date token does not parse.
"""
