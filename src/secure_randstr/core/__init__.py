"""随机字符串生成核心。"""
