import hyprinstall

if __name__ == '__main__':
	hyprinstall.run_as_a_module()
