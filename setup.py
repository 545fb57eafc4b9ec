from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="LazySeq",
    version=version,
    description="A library of lazy, composable transformations over iterables",
    long_description=long_description,
    keywords=['iterator', 'lazy', 'functional', 'pipeline', 'optional'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.6',
    install_requires=[
        'tblib'],
    extras_require={
        'tests': [
            'pytest', 'pytest-timeout', 'coverage']
    }
)
