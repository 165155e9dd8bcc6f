from setuptools import setup
from picoarg.const import VERSION_STR, DESCRIPTION

setup(
    name="picoarg",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    packages=["picoarg"],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "picoarg = picoarg:main",
            "picoarg-demo = picoarg:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
