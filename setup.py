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
    name='queensdd',
    version=get_version("queensdd/__init__.py"),
    license='Apache 2.0',
    description='N-Queens board annotation with compiled decision diagrams',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["queensdd", "queensdd.*"]),
    include_package_data=True,
    zip_safe=False,
    install_requires=[
        'pysdd>=0.2.11',
        'numpy>=1.5',
    ],
    #extra dependencies, only needed to run the tests
    extras_require={
        "test":  ["pytest", "pytest-timeout", "ortools>=9.8"],
    },
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8'
)
