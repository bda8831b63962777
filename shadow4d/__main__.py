#!/usr/bin/env python3
# shadow4d/__main__.py
from __future__ import annotations

import sys

from shadow4d.app import main

if __name__ == "__main__":
    sys.exit(main())
