from setuptools import find_packages, setup

__title__ = "spotify_authentication"
__description__ = "Build Spotify Accounts authorization requests, and pass them across process boundaries."
__version__ = "1.0.0"
__author__ = "Spotify AB"
__license__ = "Apache 2.0"
__copyright__ = "Copyright 2015 Spotify AB"

with open("README.rst", "rt") as finput:
    readme = finput.read()

with open("requirements.txt", "rt") as finput:
    requires = [line.strip() for line in finput.readlines() if line.strip()]

setup(
    name=__title__,
    version=__version__,
    description=__description__,
    long_description=readme,
    long_description_content_type="text/x-rst",
    author=__author__,
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"": ["requirements.txt"]},
    package_dir={"spotify_authentication": "spotify_authentication"},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=requires,
    extras_require={"test": ["pytest"]},
    license=__license__,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
)
