"""Heimdall data models and errors, HTTP and mock clients, and an LRU span cache."""