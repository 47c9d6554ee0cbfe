"""Setup script for trajectory order parameter analysis module and scripts"""

import glob
from setuptools import setup

setup(
    name='trajorderpy',
    version='0.1.0',
    packages=['trajorderpy'],
    scripts=glob.glob('scripts/*/*.py'),
    install_requires=['numpy'],
    extras_require={'test': ['pytest']}
)
