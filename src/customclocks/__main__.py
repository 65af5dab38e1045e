"""Run with: python -m customclocks"""
import sys

from customclocks.main import main

if __name__ == "__main__":
    sys.exit(main())
