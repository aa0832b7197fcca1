from psd2fgui.cli import main

raise SystemExit(main())
