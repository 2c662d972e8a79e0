"""Setup script for pyaesctr - AES-256-CTR streams with random access.

The block cipher itself comes from the ``cryptography`` package (OpenSSL), so
no native code is built here.
"""

from setuptools import setup

if __name__ == "__main__":
    setup(
        name="pyaesctr",
        version="0.1.0",
        description="AES-256-CTR cipher streams that can be entered at any byte offset",
        license="MIT",
        packages=["pyaesctr"],
        python_requires=">=3.10",
        install_requires=["cryptography>=3.1"],
        extras_require={"test": ["pytest"]},
        classifiers=[
            "Programming Language :: Python :: 3",
            "Topic :: Security :: Cryptography",
        ],
    )
