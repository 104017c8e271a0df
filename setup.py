# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sources-tree",
    version="1.0.0",
    description="Ordering and lookup rules for debugger sources trees",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sources_tree*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'sources-tree=sources_tree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
