"""Setup script for the icstree calendar parsing library."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read requirements, splitting out the testing dependencies
requirements_file = Path(__file__).parent / "requirements.txt"
requirements = []
test_requirements = []

if requirements_file.exists():
    section = "core"
    for line in requirements_file.read_text().strip().split("\n"):
        line = line.strip()
        if not line:
            continue
        if line.startswith("#"):
            if "testing" in line.lower():
                section = "test"
            continue

        if section == "test" or "pytest" in line:
            test_requirements.append(line)
        else:
            requirements.append(line)

setup(
    name="icstree",
    version="0.1.0",
    description="Parse and serialize iCalendar (RFC 5545) text as a component tree",
    long_description=long_description,
    long_description_content_type="text/markdown",
    # Package configuration
    packages=find_packages(exclude=["tests*", "docs*"]),
    include_package_data=True,
    # Dependencies
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
        "dev": test_requirements
        + [
            "black>=23.0.0",
            "isort>=5.12.0",
            "mypy>=1.0.0",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Office/Business :: Scheduling",
        "Topic :: Text Processing",
    ],
    keywords="calendar ics icalendar rfc5545 parser serializer",
    entry_points={
        "console_scripts": [
            "icstree=icstree.__main__:main",
        ],
    },
    zip_safe=False,
)
