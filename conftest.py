# Repository root conftest: puts the flat packages on sys.path for tests.
