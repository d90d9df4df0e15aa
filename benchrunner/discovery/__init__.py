# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark file discovery and loading.

  - locator: path patterns to an ordered list of files
  - loader: helper bootstrap, then each file loaded once with its suites collected
"""
