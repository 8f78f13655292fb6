from setuptools import setup, find_packages

setup(
    name="city-weather",
    version="1.0.0",
    author="Onehand Coding",
    author_email="onehand.coding433@gmail.com",
    description="Pick a country and city and see the current weather in your terminal",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "requests",
        "python-dotenv",
        "rich",
        "typer",
    ],  # Dependencies
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",  # Minimum Python version
    entry_points={
        "console_scripts": [
            "city-weather=city_weather.__main__:main",  # CLI command.
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
