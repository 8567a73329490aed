# SPDX-FileCopyrightText: 2025 fixedrational contributors
# SPDX-License-Identifier: Apache-2.0

from importlib.metadata import version, PackageNotFoundError

try:
    version = version("fixedrational")
except PackageNotFoundError:
    version = 'unknown'
