#!/usr/bin/env python3
# Copyright 2024 Xiaomi Corporation (Author: Wei Kang)
#
# See ../LICENSE for clarification regarding multiple authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Usage:

    python3 ./examples/build_suffix_array.py --text banana

    python3 ./examples/build_suffix_array.py \
        --text mississippi \
        --sentinel '#' \
        --validate true \
        --log-level debug
"""

import argparse
import logging

from kmrsa import AttributeDict, SuffixArray, format_suffixes, setup_logger, str2bool


def get_args():
    parser = argparse.ArgumentParser(
        """
    Build the suffix array and the rank array of the given text and print
    them together with the sorted suffixes.
    """
    )
    parser.add_argument(
        "--text",
        type=str,
        required=True,
        help="The text to index.",
    )
    parser.add_argument(
        "--sentinel",
        type=str,
        default="$",
        help="""The sentinel symbol, a single character that is smaller than
        any other character of the text. It is appended unless the text
        already contains it.
        """,
    )
    parser.add_argument(
        "--validate",
        type=str2bool,
        default=False,
        help="True to check that the sentinel is unique and the smallest symbol.",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="The directory to save the log.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="info",
        help="The log level, e.g., debug, info, warning.",
    )
    return parser.parse_args()


def main():
    args = get_args()
    params = AttributeDict(vars(args))

    setup_logger(f"{params.log_dir}/log-build-suffix-array", params.log_level)
    logging.info(f"Parameters: {params}")

    sa = SuffixArray(params.text, sentinel=params.sentinel, validate=params.validate)
    suffix_array = sa.get_suffix_array()
    rank_array = sa.get_rank_array()

    logging.info(f"Normalized text: {sa.text!r}")
    logging.info(f"Suffix array: {suffix_array.tolist()}")
    logging.info(f"Rank array: {rank_array.tolist()}")
    print(format_suffixes(sa.text, suffix_array))


if __name__ == "__main__":
    main()
