'''Vector typing and planar measurement on the block canvas'''
