# -*- coding: utf-8 -*-
"""
Base exceptions that suggest valid alternatives for a mistyped input.
"""
import difflib


class ErrorWithAlternatives(Exception):
    """An exception that, when the offending item and the list of valid
    ones are given, lists the closest matches in its message."""

    alternatives_header = "Instead of '%s', did you mean one of the following?"

    def __init__(self, message, bad_item=None, alternatives=None):
        super().__init__(message)
        self.message = message
        self.bad_item = bad_item
        if alternatives is not None:
            alternatives = list(alternatives)
        self.alternatives = alternatives

    def best_alternatives(self):
        if not self.alternatives or self.bad_item is None:
            return []
        candidates = [str(alt) for alt in self.alternatives]
        best = difflib.get_close_matches(str(self.bad_item), candidates)
        return best if best else sorted(candidates)

    def __str__(self):
        alternatives = self.best_alternatives()
        if not alternatives:
            return self.message
        header = self.alternatives_header % self.bad_item
        lines = '\n'.join(' - %s' % alt for alt in alternatives)
        return "%s\n%s\n%s" % (self.message, header, lines)
