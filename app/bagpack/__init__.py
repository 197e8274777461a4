"""bagpack - installed package inventory for brew, npm and pip.

Reports installed packages and their update status across package managers.
"""

__version__ = "0.1.0"
