# labkit

A small collection of self-contained numeric and data-structure tools in
plain Python, with no third-party dependencies.

## What is inside

| Module | Main names | Purpose |
| --- | --- | --- |
| `labkit.rc4` | `Rc4Encoder` | RC4 stream cipher over byte strings and files |
| `labkit.logical_values` | `LogicalValuesArray` | 32-bit vector of logical values with bitwise logic operations |
| `labkit.complex_number` | `ComplexNumber`, `main` | Complex arithmetic, modulus, argument, parsing of `(re+imi)` text |
| `labkit.matrix` | `Matrix`, `round_to_zero`, `main` | Dense real matrices: sum, difference, products, transpose, determinant, inverse |
| `labkit.priority_queue` | `PriorityQueue`, `QueueEmptyError` | Max-priority queue of string values keyed by integers |
| `labkit.longint` | `LongInt` | Signed arbitrary-precision integers with 32-bit-limb bitwise operations |
| `labkit.fraction` | `Fraction` | Exact fractions over `LongInt` with series-based elementary functions |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

### RC4

```python
from labkit.rc4 import Rc4Encoder

cipher = Rc4Encoder(b"placeholder")
encrypted = cipher.process(b"attack at dawn")
assert Rc4Encoder(b"placeholder").process(encrypted) == b"attack at dawn"
print(cipher.keystream(8).hex())

# Whole files are processed the same way in both directions;
# the third argument does not change the result.
cipher.encode("plain.bin", "cipher.bin", True)
```

The key must not be empty. It can be replaced through the `key` property.

### Logical values

```python
from labkit.logical_values import LogicalValuesArray

a = LogicalValuesArray(0b1100)
b = LogicalValuesArray(0b1010)
print(a.conjunction(b).to_binary_string())   # 32 characters, most significant bit first
print(a.implication(b)[3])                   # True
print(LogicalValuesArray.equals(a.xor(b), LogicalValuesArray(0b0110)))  # True
```

Values are kept to 32 bits. Also available: `inversion`, `disjunction`,
`coimplication`, `equivalence`, `pierce_arrow`, `sheffer_stroke` and
`get_bit`.

### Complex numbers

```python
from labkit.complex_number import ComplexNumber

a = ComplexNumber(3, 4)
b = ComplexNumber(1, -2)
print(a + b, a - b, a * b, a / b)   # (4+2i) (2+6i) (11-2i) (-1+2i)
print(a.abs())                      # 5.0
print(a.arg())                      # argument in radians
print(ComplexNumber.parse("(1.5-2i)"))
```

Division by zero raises `ZeroDivisionError`; the argument of zero and text
that does not parse raise `ValueError`.

### Matrices

```python
from labkit.matrix import Matrix

m = Matrix(2, 2)
m[0][0], m[0][1] = 1, 2
m[1][0], m[1][1] = 3, 4
print(m.determinant())                                  # about -2
product = m * m.inverse()
print(Matrix.compare(product, Matrix.identity(2), 1e-9))  # True
print((2 * m).transpose().format())
```

Mismatched sizes, non-square matrices for `determinant` or `inverse`, and
singular matrices in `inverse` raise `ValueError`; a row index out of range
raises `IndexError`.

### Priority queue

```python
from labkit.priority_queue import PriorityQueue

pq = PriorityQueue()
pq.add(3, "Apple")
pq.add(5, "Banana")
pq.add(1, "Cherry")
print(pq.find_max())     # Banana
print(pq.remove_max())   # Banana
print(pq.find_max())     # Apple
print(len(pq))           # 2
```

`merge` adds every entry of another queue, `copy` returns an independent
queue and `clear` empties it. Looking at or removing from an empty queue
raises `QueueEmptyError`; adding `None` as a value raises `ValueError`.

### Big integers and fractions

```python
from labkit.longint import LongInt
from labkit.fraction import Fraction

n = LongInt.from_string("123456789012345678901234567890", 10)
print(n * n)
print(LongInt(-7) // 2, LongInt(-7) % 2)   # -3 -1  (division truncates toward zero)

eps = Fraction(1, 10**6)
half = Fraction(1, 2)
print(half + half)              # 1/1
print(Fraction(2).root(2, eps))
print(half.sin(eps), half.ln(eps))
```

`Fraction` also offers `power`, `ln_small`, `log2`, `log10`, `cos`, `tg`,
`ctg`, `sec`, `cosec`, `arctg` and `arcsin`, and `from_string` for text of
the form `num/den`.

## Commands

Two demonstration commands are installed:

```
labkit-complex
```

prints the arithmetic, modulus and argument of two sample complex numbers,
then reads a number in the form `(re+imi)` from standard input and echoes it
back.

```
labkit-matrix
```

runs the 2x2 and 5x5 matrix checks (sum, product, transpose, determinant,
inverse and `A * A^-1`) and prints the results with `OK` or `FAIL`.

## Limits

- `Fraction` has no arccotangent, arccosine, arcsecant or arccosecant;
  `arctg` and `arcsin` accept only arguments with `|x| <= 1`.
- The elementary functions of `Fraction` are truncated series; their
  results are approximations, not exact values.