#!/usr/bin/env python3
"""
Copyright (c) 2025 Jakob Bolliger

This file is part of ConsoleHelpers.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Entry point for running the demo with 'python -m consolehelpers'
"""
from consolehelpers.main import main

if __name__ == "__main__":
    main()
