from setuptools import find_packages, setup
import codecs
import os.path

def read(rel_path):
    here = os.path.abspath(os.path.dirname(__file__))
    with codecs.open(os.path.join(here, rel_path), 'r') as fp:
        return fp.read()

def get_version(rel_path):
    for line in read(rel_path).splitlines():
        if line.startswith('__version__'):
            delim = '"' if '"' in line else "'"
            return line.split(delim)[1]
    else:
        raise RuntimeError("Unable to find version string.")

with open("README.md", "r") as readme_file:
    long_description = readme_file.read()

setup(
    name='queensbdd',
    version=get_version("queensbdd/__init__.py"),
    license='Apache 2.0',
    description='An N-queens game engine built on binary decision diagrams',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["queensbdd", "queensbdd.*"]),
    include_package_data=True,
    zip_safe=False,
    install_requires=[
        'dd>=0.5.7',
        'numpy>=1.5',
    ],
    # reference solver used by the test suite
    extras_require={
        "test": ["pytest", "ortools>=9.8"],
    },
    entry_points={
        "console_scripts": ["queensbdd=queensbdd.cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8'
)
