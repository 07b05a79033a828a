#!/usr/bin/env python3

import numpy as np
import kmrsa


def main():
    s = "banana"
    array = np.frombuffer(s.encode("utf-8"), dtype=np.uint8)

    # 0 is smaller than any byte of the text, so it can be used as sentinel.
    suffix_array = kmrsa.create_suffix_array(array, sentinel=0)
    print(suffix_array)

    expected = kmrsa.naive_suffix_array(array, sentinel=0)
    assert (suffix_array == expected).all()


if __name__ == "__main__":
    main()
