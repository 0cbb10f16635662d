# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import sys

from promview.cli import app


def main() -> int:
    app(sys.argv[1:])
    return 0


if __name__ == "__main__":
    sys.exit(main())
