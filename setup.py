import re
import sys


if "test" in sys.argv:
    import lfsr
    # when test was successful, return 0 (hence not)
    sys.exit(not lfsr.test().wasSuccessful())

from setuptools import setup


kwds = {}
try:
    kwds['long_description'] = open('README.rst').read()
except IOError:
    pass

# Read version from lfsr/__init__.py
pat = re.compile(r"^__version__\s*=\s*'(\S+)'", re.M)
data = open('lfsr/__init__.py').read()
kwds['version'] = pat.search(data).group(1)

setup(
    name = "lfsr",
    license = "PSF-2.0",
    classifiers = [
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Utilities",
    ],
    description = "linear feedback shift register sequences",
    packages = ["lfsr"],
    package_data = {"lfsr": ["py.typed",  # see PEP 561
                             "*.pyi"]},
    python_requires = ">=3.8",
    install_requires = ["bitarray>=2.3"],
    extras_require = {"test": ["pytest"]},
    zip_safe = False,
    **kwds
)
