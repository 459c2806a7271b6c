import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="he_daily",
    version="0.1.0",
    author="he_daily contributors",
    description="Runs and submits the Hurricane Electric IPv6 certification daily tests",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    install_requires=['requests'],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
    include_package_data=True,
    package_data={
        'he_daily': ['data/*.txt'],
    },
    python_requires='>=3.6',
    entry_points={
        "console_scripts": [
            "he_daily=he_daily.__main__:main",
        ]
    },
)
