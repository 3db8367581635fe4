# Copyright [2024] [Dashiell Stander]
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

import logging
from typing import Sequence
from tqdm import tqdm

from .permutations import Permutation


logger = logging.getLogger(__name__)


def evaluate_word(gens: Sequence[Permutation], word: Sequence[int]) -> Permutation:
    """ The product gens[word[0]] * gens[word[1]] * ... , the identity for the empty word.
    """
    result = Permutation()
    for k in word:
        result = result * gens[k]
    return result


def elements_and_words(
    gens: Sequence[Permutation],
    verbose: bool = False
) -> tuple[list[Permutation], list[tuple[int, ...]]]:
    """
    Enumerates the group generated by `gens`, pairing every element with a short word in the generators.

    The group is grown one generator at a time. Going from the subgroup H generated by gens[:i] to the one generated
    by gens[:i + 1], new right coset representatives of H are found breadth-first by multiplying the known ones by
    gens[:i + 1]; each representative r contributes the coset H * r with words word(h) + word(r).

    Representatives are found in order of non-decreasing word length, which keeps words short. They are not
    guaranteed to be of globally minimal length, since the words of H are reused as they are.

    Args:
        gens (Sequence[Permutation]): the generators
        verbose (bool): show a progress bar over the generators
    Returns:
        tuple[list[Permutation], list[tuple[int, ...]]] the sorted elements and, in the same order, words of
        0-based generator indices such that evaluate_word(gens, words[i]) == elements[i]
    """
    elements = [Permutation()]
    words = [()]
    steps = range(len(gens))
    if verbose:
        steps = tqdm(steps)
    for i in steps:
        reps = [Permutation()]
        rep_words = [()]
        new_elements = list(elements)
        new_words = list(words)
        members = set(new_elements)
        j = 0
        while j < len(reps):
            for k in range(i + 1):
                e = reps[j] * gens[k]
                if e in members:
                    continue
                we = rep_words[j] + (k,)
                reps.append(e)
                rep_words.append(we)
                coset = [x * e for x in elements]
                new_elements.extend(coset)
                members.update(coset)
                new_words.extend(w + we for w in words)
            j += 1
        elements = new_elements
        words = new_words
        logger.debug('Subgroup generated by the first %d generators has %d elements', i + 1, len(elements))

    degree = max(e.largest_moved_point() for e in elements)
    order = sorted(range(len(elements)), key=lambda o: elements[o].images(degree))
    return [elements[o] for o in order], [words[o] for o in order]
