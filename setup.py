# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="lazyindex",
    version="0.1.0",
    description="Generate a lazily-loading index.js that mirrors a directory tree as nested exports",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["lazyindex*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'lazyindex=lazyindex.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
