# chartviz

Numerical building blocks for a function chart visualiser, with no runtime
dependencies.

## Modules

- `chartviz.operations`: guarded arithmetic. Examples are `plus`, `subtract`,
  `multiply`, `divide`, `power`, `logarithm`, `exponential`, `sinus`,
  `cosinus`, `absolute` and `radical`, along with the comparisons `equal`,
  `different`, `smaller` and `bigger`.
  - Results outside the finite range become the sentinel `INFINITE` (2147483647.0).
  - Undefined results, such as division by zero or the logarithm of a
    non-positive number, become `nan`.
  - Binary operations take their operands in evaluation-stack order.
    `subtract(x, y)` returns `y - x`, `divide(x, y)` returns `y / x`, and
    `power(y, x)` returns `x ** y`.
- `chartviz.concepts`: the value types `Interval`, `Equation`, `Domain` (with
  `Domain.contains`) and `AsymptoteType`, and the text helpers
  `format_equation`, `format_domain`, `format_number`, `format_point`,
  `parse_float` and `is_digit`.
  - `parse_float` reads the leading number of a string as a single-precision
    value. It returns `INVALID_FLOAT` when the string does not start with a
    number.
- `chartviz.validation`: clean-up of function text typed by a user.
  - `validate` runs the steps in this order: `clean_characters`,
    `check_parentheses`, `wrap_negative_numbers`, `normalize_numbers`,
    `normalize_binary_operations`. It returns the normalised text.
  - On bad input it raises `ValidationError`. Its `code` attribute holds a
    `StatusCode`.
- `chartviz.analysis`: analysis of any callable `f(x) -> float`. It provides:
  - `limit_positive` and `limit_negative`;
  - `extrema_max` and `extrema_min`, which return the local extrema and the
    global one;
  - `horizontal_asymptote_plus`/`_minus` and `slant_asymptote_plus`/`_minus`;
  - `undefined_intervals`, `is_vertical_asymptote` and `vertical_asymptotes`;
  - `integral`, which applies Simpson's 3/8 rule over unit steps.
- `chartviz.random_function`: `RandomFunctionPicker` picks a function string
  uniformly at random. The strings come from a list or, through
  `RandomFunctionPicker.from_file`, from a whitespace-separated file.
- `chartviz.palette`: `Palette` provides the light and dark `Theme` colours,
  the chart colours and the four-state `ViewPalette` sets for buttons.
  Colours are `Color` values.
- `chartviz.highlight`: `HighlightAnimation` holds the state of the pulsing
  rings. Call `advance(elapsed)` with the time since the last call. It returns
  the ring radius to draw, or `None` when there is nothing to draw.
- `chartviz.keyboard`: `key_to_char` maps a `Key` to the character it types.
  `Keyboard.handle_event` records the key state for one poll of events.
- `chartviz.layout`: `Rect`, `Margins`, the alignment helpers `align_left`,
  `align_right`, `align_center_balanced_x`, `align_center_dispersed_x` and
  `align_top`, and `HorizontalLayout`. The layout moves the rectangles it is
  given.

## Install

```
pip install .
```

## Examples

```python
import math
from chartviz.analysis import extrema_max, horizontal_asymptote_plus, integral
from chartviz.validation import ValidationError, validate

points, best = extrema_max(math.sin, 0, 7)            # local maxima on [0, 7] and the best one
eq = horizontal_asymptote_plus(lambda x: 1 / x + 2)   # Equation(offset=2.0, slope=0.0, valid=True)
area = integral(lambda x: x * x, 0, 3)                # 9.0

try:
    validate("(()")
except ValidationError as err:
    print(err.code)                                   # StatusCode.INCORRECT_PARENTHESES
```

```python
from chartviz.palette import Palette, Theme

palette = Palette(Theme.DARK)
palette.main_background_color()                       # Color(r=44, g=54, b=63, a=255)
```

## What it does not do

- It does not draw anything. There is no window, chart rendering, text input
  widget or screenshot saving. The interface modules hold state and colours
  only.
- It does not evaluate function text. `validate` normalises the text, but
  turning it into a callable is left to the caller. The analysis routines need
  a Python callable.
- It provides no command-line program.

## Tests

```
pip install .[test]
pytest
```