"""Small array and string puzzles."""

from __future__ import annotations

from collections import Counter


def sum_below(val: int) -> int:
    """Return the sum of 0..val-1; raise ValueError when it is below 1."""
    total = sum(range(val))
    if total < 1:
        raise ValueError("sum low")
    return total


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return indices of two distinct entries adding up to target, or [0, 0]."""
    wanted = {target - num: index for index, num in enumerate(nums)}
    for index, num in enumerate(nums):
        other = wanted.get(num)
        if other is not None and other != index:
            return [other, index]
    return [0, 0]


def remove_duplicates(nums: list[int]) -> int:
    """Compact runs of equal values to the front of nums in place.

    Returns one more than the number of values kept.
    """
    kept = 0
    current = -101
    for value in list(nums):
        if value != current:
            nums[kept] = value
            current = value
            kept += 1
    return kept + 1


def longest_common_prefix(strs: list[str]) -> str:
    """Return the longest prefix shared by every string."""
    first = strs[0]
    if not first:
        return ""
    prefix = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


_PAIRS = {")": "(", "]": "[", "}": "{"}


def is_valid(s: str) -> bool:
    """Tell whether the brackets in s are balanced and properly nested."""
    stack: list[str] = []
    for char in s:
        if char in "([{":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack[-1] != _PAIRS[char]:
                return False
            stack.pop()
    return not stack


def max_difference(s: str) -> int:
    """Largest odd character count minus smallest even character count."""
    max_even = 101
    max_odd = 0
    for count in Counter(s).values():
        if count % 2 == 0:
            max_even = min(max_even, count)
        else:
            max_odd = max(max_odd, count)
    return max_odd - max_even


def plus_one(digits: list[int]) -> list[int]:
    """Add one to the number written by digits; the list is updated in place."""
    carry = 1
    result = []
    for digit in reversed(digits):
        carry, value = divmod(digit + carry, 10)
        result.append(value)
    result.reverse()
    digits[:] = result
    if carry and digits:
        return [carry, *digits]
    return digits


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word in s."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def maximum_difference(nums: list[int]) -> int:
    """Largest nums[j] - nums[i] with i < j and nums[i] < nums[j], else -1."""
    best = -1
    lowest = nums[0]
    for value in nums:
        lowest = min(lowest, value)
        if lowest < value:
            best = max(best, value - lowest)
    return best


def search_insert(nums: list[int], target: int) -> int:
    """Index of target in sorted nums, or where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return low


def _merge_pass(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    i = j = 0
    while i < m and j < n:
        if nums1[i] == 0:
            break
        if nums1[i] > nums2[j]:
            nums1[i], nums2[j] = nums2[j], nums1[i]
            if j + 1 < n and nums2[j] > nums2[j + 1]:
                j += 1
        i += 1
    for value in nums2[j:n]:
        nums1[i] = value
        i += 1


def merge(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge the first n values of nums2 into nums1, which holds m values and room."""
    _merge_pass(nums1, m, nums2, n)
    _merge_pass(nums1, m, nums2, n)