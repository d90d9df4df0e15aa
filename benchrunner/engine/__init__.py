# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Execution engine contract.

  - interfaces: the BenchEngine base class every engine implements
  - default: the engine used when the project doesn't configure one
"""
