import sys

from hexdump_util.cli import main

sys.exit(main(prog="python -m hexdump_util"))
