"""
服務層

這個 package 包含純計算邏輯，不負責狀態：
- RulesService：勝負判定與出拳解析
- MoveService：對手出拳來源
"""
