import os
from setuptools import setup, find_packages

version = '1.0'

here = os.path.dirname(__file__)

with open(os.path.join(here, 'README.rst')) as fp:
    longdesc = fp.read()

with open(os.path.join(here, 'CHANGELOG.rst')) as fp:
    longdesc += "\n\n" + fp.read()

setup(
    name='python-endianio',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='MIT License',
    description='Library to read/write primitive values in big or '
    'little endian byte order',
    long_description=longdesc,
    install_requires=[],
    extras_require={
        'tests': ['pytest'],
    },
    python_requires='>=3.6',
    classifiers=[
        "License :: OSI Approved :: MIT License",

        # "Development Status :: 1 - Planning",
        # "Development Status :: 2 - Pre-Alpha",
        # "Development Status :: 3 - Alpha",
        "Development Status :: 4 - Beta",
        # "Development Status :: 5 - Production/Stable",
        # "Development Status :: 6 - Mature",
        # "Development Status :: 7 - Inactive",

        "Programming Language :: Python :: 3.6",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",

        "Programming Language :: Python :: Implementation :: CPython",
    ],
    package_data={'': ['README.rst', 'CHANGELOG.rst']},
    zip_safe=False)
