import setuptools
import sys

pure_python = False
pure_notice = "\n\n**Warning!** *This package is the zero-dependency version of Wordcrypt. The one-shot `WCL.Hashes` interface will always use the internal implementation. Do NOT install this package unless you know exactly why you are doing it!*"

if '--pure' in sys.argv:
    pure_python = True
    sys.argv.remove('--pure')
    print("Building pure-python wheel")

exec(open("WCL/_version.py", "r").read())

with open("README.md", "r") as fh:
    long_description = fh.read()

if pure_python:
    pkg_name = "wordcryptpure"
    requirements = []
    long_description = long_description+pure_notice
else:
    pkg_name = "wordcrypt"
    requirements = ['cryptography>=3.4.7']

setuptools.setup(
    name=pkg_name,
    version=__version__,
    author="Wordcrypt Contributors",
    description="Word array based SHA-256 and HMAC primitives with hex, Base64, Latin1 and UTF-8 encoders",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    python_requires='>=3.8',
)
