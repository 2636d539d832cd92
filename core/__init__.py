"""Lessons for the pandas speed-training tutorial on the NYC 2013 flights table."""
