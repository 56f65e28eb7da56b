# setup.py
from setuptools import setup, find_packages

setup(
    name="folder-tree",
    version="1.0.0",
    description="Composite file-system tree: files and folders behind one interface",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'folder-tree=folder_tree.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
