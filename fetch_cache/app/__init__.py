"""
fetch-cache application package.

- fetcher: HTTP retrieval of a resource's decoded payload
- caching: memoizing wrapper around any fetcher, plus cache warming
- aggregation: all-or-nothing await of many fetches
- factory: default HTTP cache built from configuration
"""
