"""Steering CLI Module"""
