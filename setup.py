# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="pagenav",
    version="0.1.0",
    description="Next-page resolution and page listing for static-site navigation maps",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["pagenav", "pagenav.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'pagenav=pagenav.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
