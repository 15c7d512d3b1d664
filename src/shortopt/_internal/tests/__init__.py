"""shortopt tests"""
