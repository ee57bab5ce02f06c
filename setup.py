from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="suffixsplit",
    version="1.0.0",
    author="Dominick C. Pastore",
    description="Public suffix splitting for domain names",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="GPLv3+",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 or later "
        "(GPLv3+)",
        "Topic :: Internet :: Name Service (DNS)",
    ],

    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "tldextract",
        "importlib_metadata; python_version<'3.10'",
    ],
    python_requires=">=3.8",
    extras_require={
        "docs": ["sphinx"],
        "test": [
            "flake8",
            "pytest",
            "pytest-cov",
            "pytest-mock",
        ]
    },

    entry_points={
        "console_scripts": [
            "suffixsplit=suffixsplit.main:main",
        ],
    },
)
