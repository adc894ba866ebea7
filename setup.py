from setuptools import setup


setup(
    version="1.0.0",
    name="kv-service",
    description=(
        "web-service providing a greeting and a shared in-memory key-value "
        + "store"
    ),
    python_requires=">=3.10",
    install_requires=[
        "flask>=3",
        "data-plumber-http>=1,<2",
    ],
    extras_require={
        "cors": [
            "Flask-CORS>=4",
        ],
        "test": [
            "pytest>=7",
            "requests>=2",
            "Flask-CORS>=4",
        ],
    },
    packages=[
        "kv_service",
        "kv_service.app",
        "kv_service.db",
        "kv_service.db.key_value_store",
        "kv_service.db.key_value_store.adapter",
        "kv_service.db.key_value_store.backend",
        "kv_service.services",
        "kv_service.services.extensions",
        "kv_service.services.tests",
        "kv_service.services.views",
    ],
    package_data={
        "kv_service": ["py.typed"],
    },
    entry_points={
        "console_scripts": [
            "kv-service=kv_service.app.__main__:main",
        ],
    },
)
