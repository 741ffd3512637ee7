"""
vePFS Ext - 主入口
"""

from vepfs_ext.cli import main


if __name__ == "__main__":
    main()
