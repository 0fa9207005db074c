"""Run with: python -m functionplot"""
import sys

from functionplot.main import main

sys.exit(main())
