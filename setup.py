import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("arbidec/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="arbidec",
    version=version,
    author="arbidec contributors",
    description="Arbitrary-precision fixed-point arithmetic in any base, with Knuth long division to any scale.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.6',
    entry_points={
        'console_scripts': [
            'arbidec-random-tests = arbidec.random_tests:main',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
            # arbitrary precision
            # fixed point
            # long division
    ],
)
