from setuptools import setup, find_packages


with open("README", encoding="UTF-8") as f:
    readme = f.read()

with open("version.txt") as f:
    version = f.readline().strip()


setup(
    name="statusname",
    version=version,
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="Two-way lookup between status names and numeric status codes.",
    long_description=readme,
    long_description_content_type="text/markdown",
    include_package_data=True,
    package_data={"statusname": ["py.typed"]},
    zip_safe=False,
    platforms="any",
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
)
