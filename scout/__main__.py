#!/usr/bin/env python3
# scout/__main__.py
from scout.main import main

main()
