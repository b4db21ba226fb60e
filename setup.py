import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("bigfraction/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="bigfraction",
    version=version,
    author="Bob Stein",
    author_email="bob.stein@qiki.info",
    description="Exact fractions of arbitrarily large integers, with NaN and infinities, and a locale-aware parser.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/BobStein/bigfraction",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.7',
    # NOTE:  No install_requires.  The standard library has the big integers and the gcd.
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
            # rational numbers
            # arbitrary precision
            # parsing, currency, locale
    ],
)
