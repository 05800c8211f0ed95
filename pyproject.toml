[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractalppm"
version = "1.0.0"
description = "PPM image toolkit with a command menu, colour tables and Mandelbrot/Julia fractal rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["ppm", "image", "fractal", "mandelbrot", "julia", "ascii-art", "color-table"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fractalppm-menu = "fractalppm.commands:ppm_menu_main"
fractalppm-ascii-image = "fractalppm.commands:ascii_image_main"
fractalppm-image-file = "fractalppm.commands:image_file_main"
fractalppm-simple-squares = "fractalppm.commands:simple_squares_main"
fractalppm-questions = "fractalppm.commands:questions_main"
fractalppm-hero = "fractalppm.commands:hero_main"
fractalppm-hello = "fractalppm.commands:hello_main"

[tool.hatch.build.targets.wheel]
packages = ["fractalppm"]

[tool.pytest.ini_options]
addopts = "-ra"
