from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install for development, with test dependencies
#   'pip install -e .[test]'
"""

setup(
    name="zmq_json_validator",
    version="0.1.0",
    description="Round-trip validation of a node's ZMQ JSON notifications",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "msgspec>=0.18",
        "pyzmq>=25.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "zmq-json-validator=zmq_json_validator.cli:main",
        ],
    },
)
