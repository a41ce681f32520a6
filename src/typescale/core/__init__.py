"""Scale generation, style assembly and token models"""
