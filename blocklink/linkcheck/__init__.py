'''Deciding whether, and where, blocks may join'''

from .checker import BlockLinkChecker, LinkCandidate
