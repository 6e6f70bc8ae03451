from setuptools import setup, find_namespace_packages

setup(
    name="virtual_library",
    version="0.1.0",
    packages=find_namespace_packages(include=['api*', 'cli*', 'core*']),
    include_package_data=True,
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "fastapi",
        "uvicorn",
        "pydantic>=2.0",
        "email-validator",
        "Pillow",
        "python-dotenv",
        "Werkzeug",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "virtual-library=cli.main:main",
        ],
    },
)
