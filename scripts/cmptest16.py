#!/usr/bin/env python3
# Copyright 2021 ETH Zurich and University of Bologna.
#
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# Generate the golden strings for the 16-bit comparison tests
# Every line is a C string literal followed by a comma, ready to be pasted
# into an array initializer:
#   "<x> <u16|s16> <y> <u16|s16> eq ne lt le gt ge",
#
# Mixed signed/unsigned pairs are compared on their numeric values: both
# operands are promoted to a wider signed type first (int16/uint16 -> int32),
# as C integer promotion does for short/unsigned short.

import argparse
import numpy as np

VALUES = [
  0x0000,
  0x0001,
  0x00fe,
  0x00ff,
  0x0100,
  0x0101,
  0x0ffe,
  0x0fff,
  0x1000,
  0x1001,
  0xfffe,
  0xffff,
]

U16 = 'u16'
S16 = 's16'

def interpret(values):
  """Return the (unsigned, signed) 16-bit views of the same bit patterns."""
  unsigned = np.array(values, dtype=np.uint16)
  return unsigned, unsigned.view(np.int16)

def compare(x, y):
  # eq, ne, lt, le, gt, ge
  return (x == y, x != y, x < y, x <= y, x > y, x >= y)

def format_line(x, xtag, y, ytag, results):
  return "\"%04x %s %04x %s %d %d %d %d %d %d\"," % (
    (int(x) & 0xffff), xtag, (int(y) & 0xffff), ytag, *[int(r) for r in results])

def generate(values=VALUES):
  """Yield the four comparison lines of every ordered pair of values.

  Pairs are walked row by row (x outer, y inner); each pair produces
  u16/u16, s16/u16, u16/s16 and s16/s16, in this order.
  """
  unsigned, signed = interpret(values)
  for i in range(len(values)):
    ux = unsigned[i]
    sx = signed[i]
    for j in range(len(values)):
      uy = unsigned[j]
      sy = signed[j]
      yield format_line(ux, U16, uy, U16, compare(ux, uy))
      yield format_line(sx, S16, uy, U16, compare(sx, uy))
      yield format_line(ux, U16, sy, S16, compare(ux, sy))
      yield format_line(sx, S16, sy, S16, compare(sx, sy))

def main(argv=None):
  parser = argparse.ArgumentParser(
    description="Print the u16/s16 comparison golden strings on stdout")
  parser.parse_args(argv)

  for line in generate():
    print(line)

if __name__ == '__main__':
  main()
