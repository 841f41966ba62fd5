from setuptools import setup, find_packages

setup(
    name="nine-mens-morris",
    version="0.1.0",
    packages=find_packages(include=["morris", "morris.*", "ai", "ai.*",
                                    "evaluation", "evaluation.*"]),
    py_modules=["config"],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
