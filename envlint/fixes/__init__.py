"""Fixers that repair .env lines, and the runner that applies them in order."""