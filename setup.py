"""Setup script for duplex-random-py package."""

from setuptools import setup, find_packages

setup(
    name="duplex-random-py",
    use_scm_version={"fallback_version": "0.1.0"},
    setup_requires=['setuptools_scm'],
    packages=find_packages(include=['keccak_state', 'duplex_random']),
    include_package_data=True,
    python_requires=">=3.8",
    extras_require={
        'test': ['pytest'],
    },
)
