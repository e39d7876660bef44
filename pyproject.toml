[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbox"
version = "0.1.0"
description = "Small interactive console exercises: calculator, factorial, palindromes, sorting, temperature conversion and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "console", "beginner", "calculator", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillbox-calculator = "drillbox.calculator:main"
drillbox-day-of-week = "drillbox.day_of_week:main"
drillbox-factorial = "drillbox.factorial:main"
drillbox-guess-number = "drillbox.guess_number:main"
drillbox-largest-number = "drillbox.largest_number:main"
drillbox-multiplication-table = "drillbox.multiplication_table:main"
drillbox-odd-even = "drillbox.odd_even:main"
drillbox-palindrome = "drillbox.palindrome:main"
drillbox-reverse-number = "drillbox.reverse_number:main"
drillbox-rotate-array = "drillbox.rotate_array:main"
drillbox-sort-array = "drillbox.sort_array:main"
drillbox-temperature = "drillbox.temperature:main"
drillbox-vowel-counter = "drillbox.vowel_counter:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
