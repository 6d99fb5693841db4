"""
Pytest configuration for segment_intersection tests.
Adds the project root to sys.path so the package imports without installation.
"""
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
