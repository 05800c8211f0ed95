# fractalppm

A small toolkit for building binary PPM (`P6`) images: drawing shapes,
combining and filtering images, building colour tables and rendering
Mandelbrot and Julia set fractals. Everything can be driven from an
interactive command menu or used directly from Python. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The command menu

`fractalppm-menu` reads whitespace-separated commands and their answers from
standard input and writes prompts and results to standard output. It stops at
`quit` or at the end of the input. Type `menu` to list every action with its
description, sorted by name. An unknown command is reported as
`Unknown action '<name>'.`; a malformed number is reported on standard error
and the menu carries on. The grid starts out as a complex-plane test pattern.

A Mandelbrot image written to `mandelbrot.ppm`:

```
printf 'mandelbrot\ngrid 300 400 200\nfractal-plane-size -2 2 -2 2\nfractal-calculate\ngrid-apply-color-table\nwrite mandelbrot.ppm\nquit\n' | fractalppm-menu
```

The available actions:

| Action | What it does |
| --- | --- |
| `read1`, `read2` | Read a PPM file into input image 1 or 2 |
| `write` | Write the output image to a file |
| `copy` | Copy input image 1 to the output image |
| `draw-ascii` | Print the output image as ASCII art |
| `size`, `max-color-value`, `channel`, `pixel`, `clear` | Edit input image 1 |
| `circle`, `box`, `square` | Draw shapes in input image 1 |
| `+`, `-`, `*`, `/` | Set the output image from image arithmetic |
| `+=`, `-=`, `*=`, `/=` | Change input image 1 in place |
| `red-gray`, `green-gray`, `blue-gray`, `linear-gray`, `orange` | Filters from input image 1 to the output image |
| `complex-fractal`, `julia`, `mandelbrot`, `mandelbrot-power`, `manhattan` | Choose the grid type |
| `grid`, `grid-set` | Set the grid size and maximum value, or one grid value |
| `grid-apply`, `grid-apply-color-table` | Render the grid into the output image |
| `fractal-plane-size`, `julia-parameters`, `set-mandelbrot-power` | Fractal parameters |
| `fractal-calculate` | Compute the grid values, one worker thread per CPU |
| `fractal-calculate-single-thread` | Compute the grid values in one thread |
| `set-color-table-size`, `set-color`, `set-random-color`, `set-color-gradient`, `set-hsv-gradient` | Edit the colour table |
| `#` | Comment to end of line |
| `quit` | Stop |

## Other commands

- `fractalppm-ascii-image` – asks for a height and width, draws a diagonal
  quadrant pattern and prints it as ASCII art.
- `fractalppm-simple-squares` – asks for a size and prints a four-square
  pattern as ASCII art.
- `fractalppm-image-file` – asks for a height and width, draws a striped
  diagonal pattern and writes it to the file you name.
- `fractalppm-questions` – asks for a favourite colour, integer and number
  and repeats them that many times.
- `fractalppm-hero` – asks for a hero and their birth year and repeats both.
- `fractalppm-hello` – prints a greeting.

## Using it from Python

```python
from fractalppm.colors import Color, ColorTable
from fractalppm.fractals import MandelbrotSet
from fractalppm.ppm import PPM

grid = MandelbrotSet()
grid.set_grid_size(200, 300)
grid.set_plane_size(-2.0, 2.0, -2.0, 2.0)
grid.max_number = 200
grid.calculate_all_numbers()

table = ColorTable(16)
table.insert_gradient(Color(0, 255, 0), Color(255, 0, 255), 0, 15)

image = PPM()
grid.set_ppm(image, table)

with open("mandelbrot.ppm", "wb") as stream:
    image.write_stream(stream)
```

The plane bounds must lie within [-2, 2]; out-of-range settings are ignored,
as are out-of-range pixel, channel and grid values. `hsv_to_rgb` and
`rgb_to_hsv` raise `ValueError` for inputs outside their ranges.

The modules:

- `fractalppm.image` and `fractalppm.ppm` – `Image` and `PPM`: channel
  access, P6 reading and writing, arithmetic, comparisons by size, and
  grayscale and orange filters.
- `fractalppm.colors` – `Color`, `ColorTable`, `hsv_to_rgb` and `rgb_to_hsv`.
- `fractalppm.numbergrid` – `NumberGrid` and `ManhattanNumbers`.
- `fractalppm.threaded` – `ThreadedVector` and `ThreadedGrid`, which
  calculates rows in worker threads.
- `fractalppm.fractals` – `ComplexFractal`, `JuliaSet`, `MandelbrotSet` and
  `MandelbrotPower`.
- `fractalppm.actions`, `fractalppm.menu`, `fractalppm.userio`,
  `fractalppm.drawing`, `fractalppm.filters`, `fractalppm.output` – the state
  and actions behind the menu.
- `fractalppm.controllers` – the menu itself (`configure_menu`,
  `take_action`, `image_menu`) and the other program flows.
- `fractalppm.commands` – the command-line entry points.

## What it does not do

There is no graphical viewer and no interactive zooming or panning: images are
only written to PPM files or printed to the terminal as ASCII art.