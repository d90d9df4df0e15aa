# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Command-line options for the bench command.

  - models: RawOption, ParsedArgs and the CanonicalConfig handed to the engine
  - parser: raw tokens to raw options and path patterns
  - normalizer: raw options to the canonical configuration
"""
