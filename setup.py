from setuptools import setup, find_packages
import pathlib


here = pathlib.Path(__file__).parent
try:
    long_description = (here / "README.md").read_text(encoding="utf-8")
except Exception:
    long_description = "BITree — a binary indexed (Fenwick) tree for point updates and prefix/range sums."

setup(
    name="bitree",
    version="0.1.0",
    description="Binary indexed tree with O(log n) point update, prefix sum, range sum and point value queries",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="",
    packages=find_packages(exclude=("docs", "examples", "tests")),
    python_requires='>=3.10',
    install_requires=[
        "numpy",
        "pandas",
        "tqdm",
    ],
    extras_require={
        "test": [
            "pytest",
        ]
    },
    entry_points={
        "console_scripts": [
            "bitree=BITree.shell.shell:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
