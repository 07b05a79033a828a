#!/usr/bin/env python3

import kmrsa

sa = kmrsa.build("banana")
print(sa.text)

suffix_array = sa.get_suffix_array()
print(suffix_array)
print(sa.get_rank_array())

for i in suffix_array:
    print(sa.text[i:])

"""
The output is:

banana$
[6 5 3 1 0 4 2]
[4 3 6 2 5 1 0]
$
a$
ana$
anana$
banana$
na$
nana$
"""
