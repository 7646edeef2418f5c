from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="airace",
    version="1.0.0",
    description="Per-frame car motion controller for human and automated drivers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['tests']),
    entry_points = {
        'console_scripts': ['airace-sim=airace.simulate:main']
    },
    install_requires=[
        'pygame',
        'numpy',
        'pandas',
        'argcomplete',
        ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
)
