"""Containers: lists, grids, hash maps, queues, bounded arrays and spatial hashing."""