"""Classic problems used for demos and regression tests."""

from __future__ import annotations

from typing import Callable

from goalstack.problem import Problem, validate_problem_payload

MONKEY_PAYLOAD = {
    "start": ["at door", "on floor", "has ball", "hungry", "chair at door"],
    "finish": ["not hungry"],
    "ops": [
        {
            "action": "climb on chair",
            "preconds": ["chair at middle room", "at middle room", "on floor"],
            "add": ["at bananas", "on chair"],
            "delete": ["at middle room", "on floor"],
        },
        {
            "action": "push chair from door to middle room",
            "preconds": ["chair at door", "at door"],
            "add": ["chair at middle room", "at middle room"],
            "delete": ["chair at door", "at door"],
        },
        {
            "action": "walk from door to middle room",
            "preconds": ["at door", "on floor"],
            "add": ["at middle room"],
            "delete": ["at door"],
        },
        {
            "action": "grasp bananas",
            "preconds": ["at bananas", "empty handed"],
            "add": ["has bananas"],
            "delete": ["empty handed"],
        },
        {
            "action": "drop ball",
            "preconds": ["has ball"],
            "add": ["empty handed"],
            "delete": ["has ball"],
        },
        {
            "action": "eat bananas",
            "preconds": ["has bananas"],
            "add": ["empty handed", "not hungry"],
            "delete": ["has bananas", "hungry"],
        },
    ],
}

BASEBALL_PAYLOAD = {
    "start": ["hand empty", "arm down"],
    "finish": ["satisfied", "baseball in air"],
    "ops": [
        {
            "action": "raise arm",
            "preconds": ["arm down"],
            "add": ["arm up", "raising arm"],
            "delete": ["arm down"],
        },
        {
            "action": "throw baseball",
            "preconds": ["have baseball", "arm up"],
            "add": ["arm down", "baseball in air", "throwing baseball"],
            "delete": ["have baseball", "arm up"],
        },
        {
            "action": "grab baseball",
            "preconds": ["hand empty", "arm down"],
            "add": ["have baseball", "grabbing baseball"],
            "delete": ["hand empty"],
        },
        {
            "action": "drink beer",
            "preconds": ["arm down", "hand empty"],
            "add": ["satisfied", "drinking beer"],
            "delete": [],
        },
    ],
}


def monkey_problem() -> Problem:
    return validate_problem_payload(MONKEY_PAYLOAD)


def baseball_problem() -> Problem:
    return validate_problem_payload(BASEBALL_PAYLOAD)


EXAMPLES: dict[str, Callable[[], Problem]] = {
    "monkey": monkey_problem,
    "baseball": baseball_problem,
}
