[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gzrender"
version = "0.3.0"
description = "A small software renderer: pixel display, flat-shaded triangle scan conversion and a camera/matrix-stack transform pipeline with PPM output."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "rendering",
    "rasterization",
    "scan conversion",
    "z-buffer",
    "ppm",
    "graphics",
    "transformations",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gzrender = "gzrender.apps:main"

[tool.hatch.build.targets.wheel]
packages = ["gzrender"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
