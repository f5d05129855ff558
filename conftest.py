import matplotlib

# 测试环境无显示设备
matplotlib.use("Agg")
