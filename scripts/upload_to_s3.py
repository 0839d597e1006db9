#!/usr/bin/env python3
import pathlib, sys

from s3put.cli import main

if __name__ == "__main__":
    sys.exit(main(prog=pathlib.Path(sys.argv[0]).name))
