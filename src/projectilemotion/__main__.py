"""
Run with: python -m projectilemotion
"""
import sys

from projectilemotion.main import main

sys.exit(main())
