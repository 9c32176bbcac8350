from setuptools import setup, find_packages

setup(
    name="placeweather",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "httpx",
        "azure-core",
        "azure-storage-blob",
        "azure-identity",
        "azure-keyvault-secrets",
        "azure-functions",
        "pandas",
        "pyarrow",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    description="WeatherAPI proxy client, Place/Weather records and Azure Functions endpoint.",
    author="chriscoveyduck",
    author_email="",
    include_package_data=True,
)
