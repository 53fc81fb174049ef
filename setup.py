from setuptools import setup, find_packages

setup(
    name="survey-extract",
    version="1.0.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"survey_extract": ["data/*.json"]},
    install_requires=[
        "langchain-core>=0.1.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "typing-extensions>=4.5.0",
        "langgraph>=0.3.18"
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    python_requires=">=3.9",
    description="Deterministic fact extraction and audience explanations for heating survey notes",
    keywords="survey, fact-extraction, heating, rules",
)
