'''General-purpose utilities not specific to blocks or rules'''
