# -*- coding: utf-8 -*-

"""
Main entry point for running psd2fgui from a source checkout.
"""

from psd2fgui.cli import main

if __name__ == '__main__':
    raise SystemExit(main())
