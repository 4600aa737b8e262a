# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="directorytree",
    version="1.1.0",
    description="Render an indented tree of a directory hierarchy, like the Unix tree command",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["directorytree*"]),
    package_data={
        "directorytree.interface.locales": ["*.json"],
    },
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'directorytree=directorytree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
