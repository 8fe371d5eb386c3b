"""
Test suite for the pagequill project.

Unit tests live next to the area they cover (engine, compiler, importers);
end-to-end rendering and CLI tests sit at the top level.
"""
