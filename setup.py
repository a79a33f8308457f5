import os

from setuptools import find_packages, setup

BASE_PATH = os.path.abspath(os.path.dirname(__file__))

if __name__ == "__main__":
    setup(
        name="rackmap",
        version=open(os.path.join(BASE_PATH, "rackmap", "version.txt")).read().strip(),
        license="MIT",
        description="A map of hierarchical rack keys that falls back to the closest stored key",
        long_description=open(os.path.join(BASE_PATH, "README.md")).read(),
        long_description_content_type="text/markdown",
        install_requires=open(os.path.join(BASE_PATH, "requirements.txt")).readlines(),
        extras_require={"test": ["pytest"]},
        python_requires=">=3.7",
        include_package_data=True,
        package_data={"rackmap": ["version.txt"]},
        zip_safe=False,
        packages=find_packages(include=["rackmap", "rackmap.*"]),
        entry_points={
            "console_scripts": [
                "rackmap = rackmap.cli:main",
            ],
        },
        classifiers=[
            "Intended Audience :: Developers",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3 :: Only",
            "Operating System :: OS Independent",
        ],
    )
