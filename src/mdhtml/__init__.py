"""mdhtml: line-oriented lightweight markdown to HTML"""
